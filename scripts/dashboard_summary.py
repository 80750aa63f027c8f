from __future__ import annotations

import argparse
import json
import os
import sys

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def load_env_file(env_path: str) -> None:
    if not os.path.exists(env_path):
        return
    with open(env_path, "r", encoding="utf-8") as env_file:
        for line in env_file:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key, value)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the revenue and commission dashboard summary.")
    parser.add_argument(
        "--env-file",
        default=os.path.join(PROJECT_ROOT, ".env"),
        help="Path to .env file.",
    )
    parser.add_argument("--view", default="monthly", choices=["monthly", "yearly"])
    parser.add_argument("--year", type=int, default=None, help="Defaults to the current year.")
    parser.add_argument(
        "--month",
        type=int,
        default=None,
        choices=range(1, 13),
        metavar="1-12",
        help="Monthly view only. Defaults to the current month.",
    )
    parser.add_argument("--service-id", default=None, help="Restrict to one service ('all' = no filter).")
    parser.add_argument("--client-id", default=None, help="Restrict to one client ('all' = no filter).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    load_env_file(os.path.abspath(args.env_file))

    from mandataire_crm.api.dependencies import get_dashboard_service
    from mandataire_crm.core.config import get_settings
    from mandataire_crm.core.logging import configure_logging
    from mandataire_crm.schemas.dashboard import DashboardFilters

    configure_logging(get_settings().log_level)
    filters = DashboardFilters(
        view=args.view,
        year=args.year,
        month=args.month if args.view == "monthly" else None,
        service_id=args.service_id,
        client_id=args.client_id,
    )
    summary = get_dashboard_service().get_summary(filters)
    print(json.dumps(summary.model_dump(mode="json", by_alias=True), indent=2))


if __name__ == "__main__":
    main()
