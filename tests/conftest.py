"""
Shared fixtures: a small supplier feed in the ITL CSV layout.
"""

import csv

import pytest

FEED_COLUMNS = [
    "Part no", "DescriptionFR", "DescriptionEN", "Cost", "Retail", "qty",
    "MAP", "OEM", "Part no without hyphen", "UPC 1", "UPC 2",
]

FEED_ROWS = [
    ["123-001", "MANTEAU PRIORITY GTX - NOIR (P)", "PRIORITY GTX JACKET - BLACK (S)", "200", "349.99", "3", "", "KLIM", "123001", "0123", ""],
    ["123-002", "MANTEAU PRIORITY GTX - NOIR (M)", "PRIORITY GTX JACKET - BLACK (M)", "200", "349.99", "0", "", "KLIM", "123002", "", "0456"],
    ["123-003", "MANTEAU PRIORITY GTX - NOIR (G)", "PRIORITY GTX JACKET - BLACK (L)", "200", "359.99", "abc", "", "KLIM", "123003", "", ""],
    ["456-001", "LENTILLE GRAND PRIX (FUMEE)", "", "10", "19.95", "7", "", "OAKLEY", "456001", "", ""],
    ["789-001", "FILTRE A HUILE HF204", "OIL FILTER HF204", "5", "12.50", "10", "", "HIFLO", "789001", "", ""],
    ["222-001", "LENTILLE GRAND PRIX (FUMEE)", "LENS GRAND PRIX (SMOKED)", "10", "24.95", "2", "", "OAKLEY", "222001", "", ""],
    ["222-002", "LENTILLE GRAND PRIX (CLAIRE)", "LENS GRAND PRIX (CLEAR)", "10", "n/a", "1", "", "OAKLEY", "222002", "", ""],
]


@pytest.fixture
def feed_csv(tmp_path):
    """Write the sample feed to disk and return its path."""
    path = tmp_path / "itlCanada.csv"
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(FEED_COLUMNS)
        writer.writerows(FEED_ROWS)
    return path
