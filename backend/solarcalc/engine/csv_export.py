"""
CSV export of energy series.

Output is a header line of field names followed by one line per point, written
with csv.writer using "\\n" line endings, no trailing newline and no quoting.
Labels come from a fixed vocabulary (hours, day indexes, month names) that
never contains a comma; a label that did would raise csv.Error.
"""

import csv
import io

from solarcalc.config import (
    ExportView,
    CSV_HEADER_FIELDS,
    EXPORT_FILENAMES,
)
from solarcalc.engine.errors import EmptySeriesError
from solarcalc.models.estimate import EnergyPoint


def _format_value(value) -> str:
    """Numbers print like the chart shows them: 864 rather than 864.0."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def to_delimited_text(series: list[EnergyPoint], delimiter: str = ",") -> str:
    """
    Serialize a series to comma-delimited text.

    Raises EmptySeriesError if the series has no points.
    """
    if not series:
        raise EmptySeriesError("Cannot export an empty series.")

    buffer = io.StringIO()
    writer = csv.writer(
        buffer, delimiter=delimiter, quoting=csv.QUOTE_NONE, lineterminator="\n"
    )
    writer.writerow(CSV_HEADER_FIELDS)
    for point in series:
        row = point.model_dump()
        writer.writerow(_format_value(row[f]) for f in CSV_HEADER_FIELDS)
    return buffer.getvalue().rstrip("\n")


def export_filename(view: ExportView) -> str:
    """Download file name for an exported view."""
    return EXPORT_FILENAMES[ExportView(view)]
