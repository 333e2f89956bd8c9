#!/usr/bin/env python3
"""
Creates the order history database
"""
import sys
from sqlalchemy import inspect

from cakeshop.database import init_db, engine


def check_tables_exist():
    """Checks whether the order_history table is already there"""
    return inspect(engine).has_table("order_history")


def main():
    print("🗄️  Initializing Cake Shop database...")
    print(f"📍 {engine.url}")

    if check_tables_exist():
        print("✅ Tables already exist")
        return 0

    init_db()
    print("✅ Tables created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
