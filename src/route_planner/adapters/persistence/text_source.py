from __future__ import annotations

from pathlib import Path

from route_planner.adapters.aws import parse_s3_uri, s3_client


def read_text_source(location: str | Path) -> str:
    """Read a UTF-8 text file from a local path or an ``s3://bucket/key`` URI."""

    raw = str(location).strip()
    if raw.lower().startswith("s3://"):
        bucket, key = parse_s3_uri(raw)
        obj = s3_client().get_object(Bucket=bucket, Key=key)
        return obj["Body"].read().decode("utf-8")

    return Path(raw).read_text(encoding="utf-8")
