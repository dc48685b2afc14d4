import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import pandas as pd
from app.core.exceptions import AssetReadError, SourceAbsentError, SourceFormatError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["country", "competition", "country_flag", "competition_logo", "file"]


@dataclass(frozen=True)
class SourceRow:
    country: str
    competition: str
    country_flag: str
    competition_logo: str
    file: str


@dataclass(frozen=True)
class ImportedRow:
    country: str
    competition: str
    flag_blob: bytes
    logo_blob: bytes
    file_blob: bytes


class SourceImportService:
    """Reads the seeding CSV and the binary assets it points to."""

    def read_source(self, source_path) -> List[SourceRow]:
        path = Path(source_path)
        if not path.exists():
            raise SourceAbsentError(path)

        try:
            # Keep every cell as text; blank cells stay "" instead of NaN
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise SourceFormatError(f"Source '{path}' has no header row") from e
        except (OSError, UnicodeDecodeError, ValueError) as e:
            # ParserError is a ValueError; directories and unreadable files are OSError
            raise SourceFormatError(f"Source '{path}' could not be read: {e}") from e

        df.columns = [col.strip().lower() for col in df.columns]
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise SourceFormatError(f"Source '{path}' is missing columns: {', '.join(missing)}")

        rows = []
        for index, row in df.iterrows():
            source_row = SourceRow(**{col: str(row[col]).strip() for col in REQUIRED_COLUMNS})
            blank = [col for col in REQUIRED_COLUMNS if not getattr(source_row, col)]
            if blank:
                # +2: header line and 1-based numbering
                raise SourceFormatError(f"Source '{path}' line {index + 2}: blank {', '.join(blank)}")
            rows.append(source_row)

        return rows

    def count_source_rows(self, source_path) -> int:
        return len(self.read_source(source_path))

    def load_assets(self, rows: List[SourceRow], base_dir: Optional[Path] = None) -> List[ImportedRow]:
        """Read the flag, logo and payload of every row. The first unreadable file aborts the whole import."""
        imported = []
        for row in rows:
            imported.append(
                ImportedRow(
                    country=row.country,
                    competition=row.competition,
                    flag_blob=self._read_asset(row.country_flag, base_dir),
                    logo_blob=self._read_asset(row.competition_logo, base_dir),
                    file_blob=self._read_asset(row.file, base_dir),
                )
            )
        return imported

    def _read_asset(self, asset_path: str, base_dir: Optional[Path]) -> bytes:
        path = Path(asset_path)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        try:
            return path.read_bytes()
        except OSError as e:
            raise AssetReadError(asset_path, e) from e
