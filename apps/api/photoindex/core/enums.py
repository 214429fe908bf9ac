from enum import StrEnum

class IngestStatus(StrEnum):
    ok                    = "OK"
    skipped_invalid_image = "SKIPPED_INVALID_IMAGE"
    error                 = "ERROR"

    def is_failure(self) -> bool:
        return {
            IngestStatus.ok:                    False,
            IngestStatus.skipped_invalid_image: False,
            IngestStatus.error:                 True,
        }[self]
