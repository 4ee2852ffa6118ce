from stockdesk.auth.session import ProfileRepository, SessionContext, SessionSnapshot, SessionState

__all__ = ["ProfileRepository", "SessionContext", "SessionSnapshot", "SessionState"]
