"""Creates the DynamoDB tables and loads the seed catalog.

Usage:
    python -m data_layer.scripts.setup_aws                     # create and load
    python -m data_layer.scripts.setup_aws --delete            # drop every table
    python -m data_layer.scripts.setup_aws --region eu-west-1  # other region
"""
import sys

from data_layer.generators.seed import generate_seed_data
from data_layer.infrastructure.dynamodb_setup import REGION, create_tables, delete_tables, load_all_data


def parse_args(args):
    region = REGION
    delete_mode = False
    for i, arg in enumerate(args):
        if arg == "--delete":
            delete_mode = True
        elif arg == "--region" and i + 1 < len(args):
            region = args[i + 1]
    return region, delete_mode


def main(argv=None):
    region, delete_mode = parse_args(sys.argv[1:] if argv is None else argv)

    if delete_mode:
        print("🗑️  Deleting tables...\n")
        delete_tables(region)
        print("\n✅ All tables deleted")
        return

    print("=" * 60)
    print("🚀 Maintenance stock store setup")
    print(f"   Region: {region}")
    print("=" * 60)

    print("\n📊 STEP 1: DynamoDB tables")
    print("-" * 40)
    create_tables(region)

    print("\n📦 STEP 2: Seed data")
    print("-" * 40)
    generate_seed_data()
    load_all_data(region=region)

    print("\n" + "=" * 60)
    print("✅ Store ready")
    print("=" * 60)


if __name__ == "__main__":
    main()
