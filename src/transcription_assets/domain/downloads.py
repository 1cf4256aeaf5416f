"""Download lifecycle states."""

import enum


class DownloadStatus(enum.StrEnum):
    """Download lifecycle states.

    NOT_REQUESTED is also the result for exercises with nothing to fetch.
    """

    NOT_REQUESTED = "not_requested"
    SKIPPED = "skipped"
    DOWNLOADING = "downloading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
