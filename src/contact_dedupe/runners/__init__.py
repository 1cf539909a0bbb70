from contact_dedupe.runners.local import ParallelMatcher, default_worker_count

__all__ = ["ParallelMatcher", "default_worker_count"]
