"""Alloy Composition Converter entry point.

Usage: python main.py [alloy_id]
"""
import logging
import sys

from alloycomp.constants import DEFAULT_ALLOY_ID
from alloycomp.core.alloy_library import AlloyLibrary
from alloycomp.export.text_report import composition_report


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    alloy_id = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ALLOY_ID

    library = AlloyLibrary()
    try:
        comp = library.create_composition(alloy_id)
    except KeyError as exc:
        known = ", ".join(a.alloy_id for a in library.get_all_alloys())
        print(f"{exc.args[0]} (available: {known})", file=sys.stderr)
        sys.exit(1)

    comp.lock_composition()
    report = composition_report(comp, preamble=f"{library.get_alloy(alloy_id).name}\n")
    if report is None:
        sys.exit(1)
    print(report)


if __name__ == "__main__":
    main()
