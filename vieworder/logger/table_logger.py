"""Table display functionality for logs.

Renders small tables (per-node degree dumps, outlier listings) for the
terminal log using ``tabulate``.
"""

from typing import Any, List, Optional, Sequence
from tabulate import tabulate
from vieworder.logger.base_logger import AlgorithmLogger


class TableLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with table support.

    Attributes:
        float_format: Format spec passed to tabulate for float columns.
    """

    float_format: str = ".6g"

    def table(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None,
        tablefmt: str = "grid",
        colalign: Optional[Sequence[Optional[str]]] = None,
    ) -> None:
        """Display data as a formatted table."""
        if self.disabled:
            return

        if headers is None:
            headers = []

        if title:
            self.info(f"\n{title}:")

        ascii_table = tabulate(
            data,
            headers=headers,
            tablefmt=tablefmt,
            colalign=colalign,
            floatfmt=self.float_format,
            showindex=False,
        )
        self.info(ascii_table)
