from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import inspect  # noqa: E402

from bhashaconnect.database import Base, engine  # noqa: E402
import bhashaconnect.models  # noqa: F401,E402  # register every table on Base.metadata


def cascade_report(bind) -> list[str]:
    """Describe each table on ``bind`` and the foreign keys that cascade on delete."""

    inspector = inspect(bind)
    existing = set(inspector.get_table_names())
    lines: list[str] = []
    for table in Base.metadata.sorted_tables:
        if table.name not in existing:
            lines.append(f"{table.name}: missing")
            continue
        cascades = [
            f"{','.join(fk['constrained_columns'])} -> {fk['referred_table']}"
            for fk in inspector.get_foreign_keys(table.name)
            if (fk.get("options") or {}).get("ondelete", "").upper() == "CASCADE"
        ]
        lines.append(f"{table.name}: " + ("; ".join(cascades) + " ON DELETE CASCADE" if cascades else "no owner"))
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Create the users, jobs, training_content, marketplace and schemes tables on the "
            "configured database and report which rows are removed with their owner."
        )
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report the current tables; do not run any DDL.",
    )
    args = parser.parse_args(argv)

    print("database:", engine.url.render_as_string(hide_password=True))
    if not args.check:
        # The shared engine switches sqlite foreign keys on, so the cascades below hold there too.
        Base.metadata.create_all(bind=engine)

    report = cascade_report(engine)
    for line in report:
        print(" ", line)
    return 1 if any(line.endswith(": missing") for line in report) else 0


if __name__ == "__main__":
    raise SystemExit(main())
