"""Script to submit a vehicle check against the configured check API.

Example:
    python scripts/submit_check.py v1 12000 --fail LIGHTS --note "Left indicator out"
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.vehicle_check.config import get_settings
from src.vehicle_check.domain.value_objects.checklist import CheckItemKey, CheckItemStatus
from src.vehicle_check.infrastructure.logging import setup_logging
from src.vehicle_check.infrastructure.services import ServiceFactory
from src.vehicle_check.presentation.form_view import render_form


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Submit a vehicle safety check.")
    parser.add_argument("vehicle_id", nargs="?", default="", help="Vehicle ID (omit to list vehicles)")
    parser.add_argument("odometer", nargs="?", default="", help="Odometer reading in km")
    parser.add_argument("--fail", action="append", default=[], type=str.upper,
                        choices=[key.value for key in CheckItemKey],
                        help="Checklist key that failed (repeatable)")
    parser.add_argument("--note", default="", help="Free-text note")
    return parser.parse_args(argv)


async def submit_check(args) -> bool:
    """Fill the check form from arguments and submit it."""
    settings = get_settings()
    submitted = []

    async with ServiceFactory(settings).open_check_form(lambda: submitted.append(True)) as form:
        view = render_form(form.state, settings.note_max_length)
        if view.vehicles_error:
            print(f"❌ {view.vehicles_error}")
            return False

        if not args.vehicle_id:
            for option in view.vehicle_options[1:]:
                print(f"{option.value}\t{option.label}")
            return True

        form.select_vehicle(args.vehicle_id)
        form.set_odometer_text(args.odometer)
        form.set_note(args.note)
        for key in args.fail:
            form.set_item_status(CheckItemKey(key), CheckItemStatus.FAIL)

        await form.submit()
        view = render_form(form.state, settings.note_max_length)

    if submitted:
        print("✅ Check submitted")
        return True

    if view.banner_error:
        print(f"❌ {view.banner_error}")
    if view.validation_heading:
        print(view.validation_heading)
        for message in view.validation_errors:
            print(f"  - {message}")
    return False


if __name__ == "__main__":
    setup_logging(get_settings())
    ok = asyncio.run(submit_check(parse_args()))
    sys.exit(0 if ok else 1)
