"""Abstract interface for application process calls."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from employee_upload.domain import FormSnapshot, ProcessResponse


class ProcessClient(ABC):
    """Abstract base class for invoking named server-side processes."""

    @abstractmethod
    def call(
        self,
        process_name: str,
        form: FormSnapshot,
        values: Sequence[str],
    ) -> ProcessResponse:
        """
        Invokes a named process with positional parameter values.

        Args:
            process_name: Name of the server-side process.
            form: Form snapshot supplying the application and session context.
            values: Positional parameters, sent in order.

        Returns:
            The parsed process response.

        Raises:
            ProcessCallError: If the call fails or the reply is not a JSON object.
        """
        pass
