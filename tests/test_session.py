"""Session context and profile repository tests."""

from unittest.mock import MagicMock

from botocore.exceptions import ClientError, EndpointConnectionError

from stockdesk.auth.session import ProfileRepository, SessionContext, SessionState
from stockdesk.models.inventory import UserProfile, UserRole, UserStatus


class TestSessionLifecycle:
    def test_starts_signed_out(self):
        session = SessionContext()
        assert session.snapshot.state is SessionState.SIGNED_OUT
        assert session.snapshot.profile is None

    def test_sign_in_provisional_profile(self):
        session = SessionContext()
        snapshot = session.sign_in("u-9", "ana.lima@example.com")
        assert snapshot.state is SessionState.SIGNED_IN
        assert snapshot.profile.name == "ana.lima"
        assert snapshot.profile.role is UserRole.TECHNICIAN

    def test_stored_profile_replaces_provisional(self):
        stored = UserProfile("u-1", "Roberto Silva", "roberto.silva@example.com", role=UserRole.MANAGER)
        session = SessionContext()
        snapshot = session.sign_in("u-1", "roberto.silva@example.com", profile_loader=lambda uid: stored)
        assert snapshot.profile is stored

    def test_sign_out_returns_to_signed_out(self):
        session = SessionContext()
        session.sign_in("u-1", "a@example.com")
        session.sign_out()
        assert session.is_signed_in is False
        assert session.snapshot.user_id is None

    def test_listeners_and_unsubscribe(self):
        session = SessionContext()
        listener = MagicMock()
        unsubscribe = session.subscribe(listener)

        session.sign_in("u-1", "a@example.com")
        session.sign_out()
        assert [c.args[0] for c in listener.call_args_list] == ["signed_in", "signed_out"]

        unsubscribe()
        session.sign_in("u-1", "a@example.com")
        assert listener.call_count == 2

    def test_repeat_sign_in_same_user_is_quiet(self):
        session = SessionContext()
        listener = MagicMock()
        session.subscribe(listener)
        session.sign_in("u-1", "a@example.com")
        session.sign_in("u-1", "a@example.com")
        assert listener.call_count == 1


class TestProfileRepository:
    def test_get_profile(self, dynamodb, tables, settings):
        repo = ProfileRepository(settings=settings, dynamodb_resource=dynamodb)
        tables["Profiles"].get_item.return_value = {
            "Item": {"id": "u-2", "name": "Carlos Mendes", "email": "c@example.com", "role": "admin"}
        }
        profile = repo.get_profile("u-2")
        assert profile.role is UserRole.ADMIN
        assert profile.name == "Carlos Mendes"

    def test_missing_or_error_yields_none(self, dynamodb, tables, settings):
        repo = ProfileRepository(settings=settings, dynamodb_resource=dynamodb)
        tables["Profiles"].get_item.return_value = {}
        assert repo.get_profile("u-3") is None
        tables["Profiles"].get_item.side_effect = ClientError(
            {"Error": {"Code": "InternalServerError", "Message": "x"}}, "GetItem"
        )
        assert repo.get_profile("u-3") is None

    def test_repository_as_loader(self, dynamodb, tables, settings):
        repo = ProfileRepository(settings=settings, dynamodb_resource=dynamodb)
        tables["Profiles"].get_item.return_value = {"Item": {"id": "u-1", "name": "R", "email": "r@x", "role": "manager"}}
        snapshot = SessionContext().sign_in("u-1", "r@x", profile_loader=repo)
        assert snapshot.profile.role is UserRole.MANAGER

    def test_connection_error_yields_none(self, dynamodb, tables, settings):
        repo = ProfileRepository(settings=settings, dynamodb_resource=dynamodb)
        tables["Profiles"].get_item.side_effect = EndpointConnectionError(
            endpoint_url="https://dynamodb.us-east-1.amazonaws.com"
        )
        assert repo.get_profile("u-1") is None
        snapshot = SessionContext().sign_in("u-1", "r@x", profile_loader=repo)
        assert snapshot.profile.role is UserRole.TECHNICIAN

    def test_unknown_role_falls_back_to_viewer(self, dynamodb, tables, settings):
        repo = ProfileRepository(settings=settings, dynamodb_resource=dynamodb)
        tables["Profiles"].get_item.return_value = {
            "Item": {"id": "u-4", "name": "S", "email": "s@x", "role": "supervisor", "status": "suspended"}
        }
        snapshot = SessionContext().sign_in("u-4", "s@x", profile_loader=repo)
        assert snapshot.state is SessionState.SIGNED_IN
        assert snapshot.profile.role is UserRole.VIEWER
        assert snapshot.profile.status is UserStatus.ACTIVE

    def test_missing_role_is_viewer(self, dynamodb, tables, settings):
        repo = ProfileRepository(settings=settings, dynamodb_resource=dynamodb)
        tables["Profiles"].get_item.return_value = {"Item": {"id": "u-5", "name": "N", "email": "n@x"}}
        assert repo.get_profile("u-5").role is UserRole.VIEWER
