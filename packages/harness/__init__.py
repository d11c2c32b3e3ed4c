from .core import replay_words
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = ["replay_words", "write_csv", "write_manifest", "timestamp_id", "git_commit_or_unknown"]
