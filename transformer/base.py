"""Abstract base class for week view transformers."""

from abc import ABC, abstractmethod
from typing import Any

from timetable.view import WeekView


class BaseTransformer(ABC):
    """Abstract base class defining the interface for week view transformers.

    Extend this class to implement transformers for different output formats
    (e.g., iCalendar, JSON, printable tables).
    """

    @abstractmethod
    def transform(self, view: WeekView) -> Any:
        """Transform a projected week into the target format.

        Args:
            view: The week to export.

        Returns:
            Transformed data in the target format.
        """
        pass

    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.

        Args:
            output_path: Path to the output file.
        """
        pass
