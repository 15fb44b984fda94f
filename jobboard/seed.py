"""
Seed the jobs collection with a fixed sample set for demos.

Usage:
    python -m jobboard.seed              # Clear jobs, insert the sample set
    python -m jobboard.seed --dry-run    # Print the sample set, touch nothing
"""

import argparse
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .repositories.base import DocumentRepositoryInterface

logger = logging.getLogger(__name__)

SAMPLE_JOBS: List[Dict[str, Any]] = [
    {
        "title": "Senior Frontend Engineer",
        "company": "Stripe",
        "location": "San Francisco, CA",
        "categories": ["Engineering", "Frontend"],
        "description": "Build the dashboards millions of businesses use to run their payments.",
        "type": "Full Time",
        "featured": True,
        "logo": "https://logo.clearbit.com/stripe.com",
    },
    {
        "title": "Brand Designer",
        "company": "Dropbox",
        "location": "Remote (US)",
        "categories": ["Design"],
        "description": "Shape the visual identity of Dropbox across product, marketing and events.",
        "type": "Full Time",
        "featured": True,
        "logo": "https://logo.clearbit.com/dropbox.com",
    },
    {
        "title": "Product Designer",
        "company": "Figma",
        "location": "New York, NY",
        "categories": ["Design", "Product"],
        "description": "Design collaborative editing workflows for teams of every size.",
        "type": "Full Time",
        "featured": False,
        "logo": "https://logo.clearbit.com/figma.com",
    },
    {
        "title": "Backend Engineer (Python)",
        "company": "Spotify",
        "location": "Stockholm, Sweden",
        "categories": ["Engineering", "Backend"],
        "description": "Own the services behind playlist personalization and recommendations.",
        "type": "Full Time",
        "featured": False,
        "logo": "https://logo.clearbit.com/spotify.com",
    },
    {
        "title": "Data Analyst",
        "company": "Airbnb",
        "location": "Remote",
        "categories": ["Data"],
        "description": "Turn booking and search data into decisions for the host growth team.",
        "type": "Contract",
        "featured": False,
        "logo": "https://logo.clearbit.com/airbnb.com",
    },
    {
        "title": "Marketing Manager",
        "company": "Notion",
        "location": "London, UK",
        "categories": ["Marketing"],
        "description": "Lead lifecycle campaigns for Notion's European self-serve customers.",
        "type": "Full Time",
        "featured": True,
        "logo": "https://logo.clearbit.com/notion.so",
    },
    {
        "title": "DevOps Engineer",
        "company": "Datadog",
        "location": "Berlin, Germany",
        "categories": ["Engineering", "Infrastructure"],
        "description": "Keep the ingestion pipeline running across regions and cloud providers.",
        "type": "Full Time",
        "featured": False,
        "logo": "https://logo.clearbit.com/datadoghq.com",
    },
    {
        "title": "UX Research Intern",
        "company": "Shopify",
        "location": "Toronto, Canada",
        "categories": ["Design", "Research"],
        "description": "Run interviews and usability studies with merchants launching their first store.",
        "type": "Internship",
        "featured": False,
        "logo": None,
    },
]


def build_sample_jobs(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    Copy the sample set with fresh timestamps.

    Jobs are stamped one hour apart so newest-first ordering matches the
    order of SAMPLE_JOBS.
    """
    now = now or datetime.utcnow()
    jobs = []
    for index, sample in enumerate(SAMPLE_JOBS):
        job = dict(sample)
        job["categories"] = list(sample["categories"])
        job["created_at"] = now - timedelta(hours=index)
        jobs.append(job)
    return jobs


def seed_jobs(jobs: DocumentRepositoryInterface, now: Optional[datetime] = None) -> int:
    """
    Replace every job with the sample set.

    Applications are left untouched; any that pointed at removed jobs
    keep their dangling job_id.

    Returns:
        Number of jobs inserted

    Raises:
        StoreError: clearing or inserting failed
    """
    cleared = jobs.delete_many({})
    result = jobs.insert_many(build_sample_jobs(now))
    logger.info(f"Seeded jobs: cleared={cleared.deleted_count} inserted={len(result.inserted_ids)}")
    return len(result.inserted_ids)


def main(argv: Optional[List[str]] = None) -> int:
    from .config import validate_config_on_startup
    from .logger import setup_logging
    from .repositories.store import BoardStore

    parser = argparse.ArgumentParser(description="Seed the job board with sample jobs")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the sample jobs without writing"
    )
    args = parser.parse_args(argv)

    load_dotenv()
    settings = validate_config_on_startup()
    setup_logging(settings.log_level, settings.log_format)

    if args.dry_run:
        for job in build_sample_jobs():
            print(f"  - {job['title']} @ {job['company']} ({', '.join(job['categories'])})")
        print(f"{len(SAMPLE_JOBS)} sample jobs (dry run, nothing written)")
        return 0

    store = BoardStore.from_settings(settings)
    store.connect()
    try:
        count = seed_jobs(store.jobs)
    finally:
        store.close()

    print(f"Seeded {count} jobs into {settings.mongo_db_name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
