"""Seed the people and offenses datasets from a JSON fixture.

Every row goes through the registry facade, so fixture entries that break
a rule are reported and skipped rather than written.

Usage:
    python scripts/seed_registry.py --data-dir ./data
    python scripts/seed_registry.py --backend s3 --bucket roadregistry-datasets \
        --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import json
from collections import defaultdict
from pathlib import Path
from typing import Any

import boto3

from roadregistry.core.config import AppSettings, S3Config, StorageConfig
from roadregistry.models.person import PersonDraft
from roadregistry.registry import RoadRegistry, create_registry

DEFAULT_SEED = Path(__file__).resolve().parent.parent / "config" / "registry_seed.json"


def create_bucket(s3: Any, bucket: str) -> None:
    """Create the dataset bucket. Skips if it already exists."""
    existing = [b["Name"] for b in s3.list_buckets().get("Buckets", [])]
    if bucket in existing:
        print(f"  Bucket {bucket} already exists, skipping")
        return
    s3.create_bucket(Bucket=bucket)
    print(f"  Created bucket {bucket}")


def load_seed(path: Path = DEFAULT_SEED) -> dict[str, Any]:
    return json.loads(path.read_text())


def seed_registry(registry: RoadRegistry, data: dict[str, Any]) -> dict[str, int]:
    """Register fixture people, then record their offenses grouped per identity."""
    counts = {"people": 0, "people_rejected": 0, "offense_batches": 0, "offense_batches_rejected": 0}

    for person in data.get("people", []):
        result = registry.register(PersonDraft(**person))
        if result:
            counts["people"] += 1
        else:
            counts["people_rejected"] += 1
            print(f"  Skipped {person.get('identity')!r}: {result.reason}")
    print(f"  Seeded {counts['people']} people")

    batches: dict[str, list[tuple[str, int]]] = defaultdict(list)
    for offense in data.get("offenses", []):
        batches[offense["identity"]].append((offense["offense_date"], offense["points"]))

    for identity, batch in batches.items():
        result = registry.record_offenses(identity, batch)
        if result:
            counts["offense_batches"] += 1
        else:
            counts["offense_batches_rejected"] += 1
            print(f"  Skipped offenses for {identity!r}: {result.reason}")
    print(f"  Seeded offenses for {counts['offense_batches']} people")
    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed RoadRegistry datasets")
    parser.add_argument("--seed", type=Path, default=DEFAULT_SEED, help="JSON fixture path")
    parser.add_argument("--backend", choices=["local", "s3"], default="local")
    parser.add_argument("--data-dir", default=".", help="Directory for local datasets")
    parser.add_argument("--bucket", default="roadregistry-datasets", help="S3 bucket")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    settings = AppSettings(
        storage=StorageConfig(backend=args.backend, data_dir=args.data_dir),
        s3=S3Config(bucket=args.bucket, region=args.region, endpoint_url=args.endpoint_url),
    )

    if args.backend == "s3":
        kwargs: dict[str, Any] = {"region_name": args.region}
        if args.endpoint_url:
            kwargs["endpoint_url"] = args.endpoint_url
        print("Creating bucket...")
        create_bucket(boto3.client("s3", **kwargs), args.bucket)

    print("Seeding data...")
    seed_registry(create_registry(settings), load_seed(args.seed))

    print("Done!")


if __name__ == "__main__":
    main()
