"""
Data Logger Module

Classes:
    DataLogger: Append per-generation fitness records to a CSV file
"""

import csv
import os

class DataLogger:
    """
    Records the best fitness of every generation in a CSV file.

    The file always gets a '.csv' extension. A 'Generation,Fitness' header is
    written when the file is created; later records are appended, so several
    runs can log to the same file.

    Public Attributes:
        path: Path of the CSV file

    Public Methods:
        log(generation, fitness): Append one record
    """

    HEADER = ("Generation", "Fitness")

    def __init__(self, path: str):
        root, _ = os.path.splitext(path)
        self.path: str = root + ".csv"

    def log(self, generation: int, fitness: float) -> None:
        write_header = not os.path.exists(self.path)
        with open(self.path, 'a', newline='') as file:
            writer = csv.writer(file)
            if write_header:
                writer.writerow(self.HEADER)
            writer.writerow((generation, fitness))

    def __repr__(self):
        return f"DataLogger({self.path!r})"
