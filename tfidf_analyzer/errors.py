"""Exceptions raised while bringing documents into a corpus."""


class IngestionError(Exception):
    """One or more documents could not be turned into text.

    Args:
        failures: list of (name, reason) pairs, one per skipped document.
        added_ids: ids of the documents from the same batch that were
            ingested anyway.
    """

    def __init__(self, failures, added_ids=()):
        self.failures = list(failures)
        self.added_ids = list(added_ids)
        names = ", ".join(str(name) for name, _ in self.failures)
        super().__init__(f"{len(self.failures)} document(s) could not be ingested: {names}")

    @property
    def failed_names(self):
        return [name for name, _ in self.failures]
