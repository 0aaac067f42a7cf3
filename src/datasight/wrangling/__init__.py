"""Table transformations.

Every operation takes a Table and returns Result[Table]; the input table is
never modified.
"""

from datasight.wrangling.calculations import add_calculated_column
from datasight.wrangling.cleaning import bin_column, remove_duplicates, remove_nulls, standardize
from datasight.wrangling.filtering import filter_rows
from datasight.wrangling.preprocessing import drop_incomplete_rows, remove_outliers

CLEANING_OPERATIONS = {
    "remove_nulls": remove_nulls,
    "remove_duplicates": remove_duplicates,
    "standardize": standardize,
    "binning": bin_column,
}

__all__ = [
    "CLEANING_OPERATIONS",
    "add_calculated_column",
    "bin_column",
    "drop_incomplete_rows",
    "filter_rows",
    "remove_duplicates",
    "remove_nulls",
    "remove_outliers",
    "standardize",
]
