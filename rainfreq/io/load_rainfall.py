"""
Module for loading annual maximum rainfall data.
"""
import warnings
import numpy as np
import pandas as pd
from typing import List, Union

# Values below this are missing-data sentinels (e.g. -9999)
MISSING_SENTINEL = -999

ID_COLUMNS = ('year', 'staNo')


def load_rainfall(file_path: str) -> pd.DataFrame:
    """
    Load annual maximum rainfall depths from CSV.

    Expected format:
    year,staNo,60,120,180,...
    1956,00H710,140.0,238.6,291.1,...

    Each numeric header is a storm duration in minutes.

    Parameters
    ----------
    file_path : str
        Path to the CSV file.

    Returns
    -------
    pd.DataFrame
        One row per year. Duration columns are renamed to integers and
        coerced to numeric (unparseable cells become NaN).
    """
    # Read as text so station numbers keep leading zeros
    df = pd.read_csv(file_path, dtype=str)
    df.columns = [str(c).strip() for c in df.columns]

    if 'year' not in df.columns:
        raise ValueError("Could not identify 'year' column in rainfall file")
    df['year'] = pd.to_numeric(df['year'], errors='coerce')

    durations = _duration_columns(df.columns)
    if not durations:
        raise ValueError("No duration columns found in rainfall file")

    df = df.rename(columns={c: int(float(c)) for c in durations})
    for d in get_durations(df):
        df[d] = pd.to_numeric(df[d], errors='coerce')

    return df


def _duration_columns(columns) -> List[str]:
    found = []
    for c in columns:
        if c in ID_COLUMNS:
            continue
        try:
            float(c)
        except ValueError:
            continue
        found.append(c)
    return found


def get_durations(df: pd.DataFrame) -> List[int]:
    """Sorted storm durations (minutes) present in the table."""
    return sorted(c for c in df.columns if isinstance(c, (int, np.integer)))


def get_station(df: pd.DataFrame) -> str:
    """Station number from the first record, or 'N/A'."""
    if 'staNo' in df.columns and not df.empty and pd.notna(df['staNo'].iloc[0]):
        return str(df['staNo'].iloc[0])
    return 'N/A'


def get_duration_rain(df: pd.DataFrame, duration: Union[int, str]) -> np.ndarray:
    """
    Annual maximum series for one duration.

    Missing values (NaN or below the -999 sentinel) are dropped with a
    warning so the analysis core only receives finite numbers.

    Parameters
    ----------
    df : pandas.DataFrame
        Output of :func:`load_rainfall`
    duration : int or str
        Duration in minutes

    Returns
    -------
    numpy.ndarray
        Rainfall depths in year order
    """
    key = int(duration)
    if key not in df.columns:
        raise KeyError(f"Duration {duration} not found; available: {get_durations(df)}")

    values = df[key].to_numpy(dtype=float)
    valid = np.isfinite(values) & (values >= MISSING_SENTINEL)
    n_dropped = int((~valid).sum())
    if n_dropped:
        warnings.warn(f"Dropped {n_dropped} missing values for duration {key}")

    return values[valid]
