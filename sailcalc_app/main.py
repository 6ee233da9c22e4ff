"""
Demo entry point: describe a cruising sailboat and print its design ratios.
"""

import logging
import sys
from pathlib import Path

from sailcalc_app.config.ratio_bands import get_dl_bands  # type: ignore[import]
from sailcalc_app.config.settings import Settings, init_logging  # type: ignore[import]
from sailcalc_app.models import Area, Boat, Length, Weight  # type: ignore[import]
from sailcalc_app.services.design_ratios import Ratios  # type: ignore[import]
from sailcalc_app.services.validation import validate_boat  # type: ignore[import]


def build_demo_boat() -> Boat:
    boat = Boat("Sail cruiser")
    boat.loa = Length.from_foot(34.0)
    boat.dwl = Length.from_foot(32.0)
    boat.b_max = Length.from_foot_inch(10.0, 6.0)
    boat.displacement = Weight.from_pound(15680.0)
    boat.sail_area = Area.from_foot2(704.0)
    return boat


def main() -> None:
    """Compute and print the ratios of the demo boat."""
    settings = Settings.default()
    init_logging(settings)
    log = logging.getLogger(__name__)

    boat = build_demo_boat()
    for issue in validate_boat(boat).issues:
        log.warning("%s: %s", issue.code, issue.message)

    ratios = Ratios.from_boat(boat, get_dl_bands(settings.dl_preset))
    log.info("Ratios computed for %s", boat.name)

    print(boat)
    print(ratios)


if __name__ == "__main__":
    # Allow running as a script: `python -m sailcalc_app.main`
    # or `python sailcalc_app/main.py` (when cwd is project root)
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    main()
