import glob
import os
import shutil
from dataclasses import fields
from typing import List

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq


class ParquetWriter:
    """Writes batches of log entries to numbered parquet part files.

    Each call to :meth:`write_batch` produces ``part-xxxxx.parquet`` inside
    'folder' with one column per field of the 'schema' dataclass. The parts
    are combined into a single file with :meth:`merge`.
    """
    def __init__(self, folder: str, schema):
        self.folder = folder
        self.schema = schema
        self.columns = [f.name for f in fields(schema)]
        os.makedirs(folder, exist_ok=True)
        self.counter = 0

    def write_batch(self, entries: List):
        if not entries:
            return
        if not os.path.exists(self.folder):
            os.makedirs(self.folder)

        df = pd.DataFrame([entry.to_dict() for entry in entries], columns=self.columns)
        file_path = os.path.join(self.folder, f"part-{self.counter:05d}.parquet")
        self.counter += 1

        table = pa.Table.from_pandas(df, preserve_index=False)
        pq.write_table(table, file_path, compression='brotli')

    def part_files(self) -> List[str]:
        return sorted(glob.glob(os.path.join(self.folder, "part-*.parquet")))

    def merge(self, output_file: str, remove_parts: bool = True) -> bool:
        """Concatenates all part files into 'output_file'.

        Returns:
            bool: `False` if there were no part files to merge.
        """
        parts = self.part_files()
        if not parts:
            return False

        combined_df = pd.concat([pd.read_parquet(f) for f in parts], ignore_index=True)
        table = pa.Table.from_pandas(combined_df, preserve_index=False)
        pq.write_table(table, output_file, compression='snappy')

        if remove_parts:
            shutil.rmtree(self.folder)

        return True
