from typing import Dict, Iterable


def _bucket_size(bucket) -> int:
    if not bucket:
        return 0
    return len(bucket.get("campaigns") or [])


def stage_count(segment: Dict, stage_id: str) -> int:
    """Number of campaigns in one stage bucket of a segment, 0 when the bucket is absent."""
    stages = segment.get("stages") or {}
    return _bucket_size(stages.get(stage_id))


def segment_campaign_count(segment: Dict) -> int:
    stages = segment.get("stages") or {}
    return sum(_bucket_size(bucket) for bucket in stages.values())


def total_campaigns(segments: Iterable[Dict]) -> int:
    """Sum of campaign counts across every stage bucket of every given segment."""
    return sum(segment_campaign_count(segment) for segment in segments or [])
