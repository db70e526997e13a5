"""
Quick connectivity check for the infra research API.

Runs one operation against INFRA_API_BASE_URLS (or --base-url overrides) and
prints the decoded result as JSON. Exits non-zero on failure.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from _bootstrap import bootstrap

bootstrap()

from infra_research.connectors.infra_api import InfraApiClient  # noqa: E402
from infra_research.core.exceptions import InfraApiError, error_payload  # noqa: E402
from infra_research.core.logging import setup_logging  # noqa: E402

logger = logging.getLogger("infra_research.smoke")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Infra research API smoke check")
    parser.add_argument("model_name", help="Infrastructure model to research")
    parser.add_argument("--province", default=None)
    parser.add_argument(
        "--base-url",
        dest="base_urls",
        action="append",
        default=None,
        help="Candidate base URL; repeat to try several in order",
    )
    parser.add_argument("--images", action="store_true", help="Generate research images instead")
    parser.add_argument("--report", action="store_true", help="Generate a structural design report")
    parser.add_argument("--location", default="Lahore")
    parser.add_argument("--stories", type=int, default=2)
    parser.add_argument("--use", dest="intended_use", default="Residential")
    parser.add_argument("--geotech", dest="geo_tech_report", default=None)
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> dict:
    client = InfraApiClient(args.base_urls)
    if args.report:
        report = await client.generate_structural_design_report(
            args.model_name,
            args.location,
            args.stories,
            args.intended_use,
            geo_tech_report=args.geo_tech_report,
        )
        return report.model_dump(mode="json", by_alias=True)
    if args.images:
        image_set = await client.generate_research_images(args.model_name, args.province)
        # Data URLs are large; print only their size
        return {
            "images": [
                {"view": image.view, "bytes": len(image.decode()[1])} for image in image_set.images
            ]
        }
    result = await client.research_model(args.model_name, args.province)
    return result.model_dump(mode="json", by_alias=True)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    try:
        output = asyncio.run(_run(args))
    except InfraApiError as exc:
        logger.error("Infra research request failed: %s", exc)
        print(json.dumps(error_payload(exc), indent=2, default=str))
        return 1
    except ValueError as exc:
        logger.error("Infra research response could not be used: %s", exc)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
