"""Factory for topology model objects."""
from typing import Any, Dict, List

from src.models.classification import Classification, materialize
from src.models.context import ContextParams


class ModelFactory:
    """Creates classification objects bound to a client set."""

    def __init__(self, client_set):
        self.client_set = client_set

    def create_classification(self, params: ContextParams) -> Classification:
        """Return an empty classification ready to be parsed."""
        return Classification(params, self.client_set)

    @staticmethod
    def create_classifications(
        params: ContextParams, client_set, records: List[Dict[str, Any]]
    ) -> List[Classification]:
        """Materialize raw records, keeping their order."""
        return materialize(params, client_set, records)
