"""
Story report.

Loads the card catalog and logs the story comparison for every arena:
the projected cards (tallest first) and each group's mean.
"""

import argparse
import asyncio
import logging

from clashlens.config import settings
from clashlens.models.groups import GROUP_INFO
from clashlens.models.projection import ArenaProjection
from clashlens.services.catalog_loader import CatalogLoader
from clashlens.services.projection import build_story_projections

logger = logging.getLogger(__name__)


def format_projection(projection: ArenaProjection) -> list[str]:
    """Human-readable lines for one arena chart."""
    lines = [f"{projection.arena.display_name} ({projection.arena.column_key})"]

    if projection.is_empty:
        lines.append("  no data for this arena")
        return lines

    for record in projection.records:
        lines.append(f"  {record.name:<16} {GROUP_INFO[record.group].label:<12} {record.value:g}")

    for group, mean in projection.means.items():
        label = GROUP_INFO[group].mean_label
        lines.append(f"  {label}: {'-' if mean is None else f'{mean:.1f}'}")

    return lines


async def run_report(source: str) -> dict[str, ArenaProjection]:
    """Load the catalog from `source` and log every arena's story chart."""
    loader = CatalogLoader(source, timeout=settings.catalog_fetch_timeout)

    try:
        catalog = await loader.load()
    except Exception as e:
        logger.error("Story report aborted: %s", e)
        raise

    story = build_story_projections(catalog)
    for projection in story.values():
        for line in format_projection(projection):
            logger.info("%s", line)
    return story


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Log per-arena group comparisons")
    parser.add_argument(
        "--source",
        default=settings.catalog_source,
        help="CardList CSV path or URL",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_report(args.source))


if __name__ == "__main__":
    main()
