from instance import EDGE_WEIGHT_TYPES, TSPInstance

from typing import Dict, List
import numpy as np
from pathlib import Path


class LoadError(ValueError):
    """
    Raised when a problem file is missing or malformed
    """


class TSPLoader:
    """
    Loader for TSPLIB-format problem files (NODE_COORD_SECTION subset).
    """

    DEFAULT_EDGE_WEIGHT_TYPE = "EUC_2D"

    @staticmethod
    def load_from_file(filepath: str, populate: bool = False, db = None) -> TSPInstance:
        """
        Load a TSP instance from a TSPLIB file

        Args:
            filepath: Path to the problem file
            populate: If True, add problem metadata to the database
            db: pandas DataFrame to populate (required if populate=True)
        """
        try:
            with open(filepath, 'r') as f:
                lines = [line.strip() for line in f.readlines()]
        except OSError as e:
            raise LoadError(f"Cannot read {filepath}: {e}") from e

        # header information
        metadata = {}
        dimension = None
        start = None

        for k, line in enumerate(lines):
            if not line:
                continue

            if line.startswith('NODE_COORD_SECTION'):
                start = k + 1
                break

            if ':' in line:
                key, value = (part.strip() for part in line.split(':', 1))
                metadata[key] = value
                if key == 'DIMENSION':
                    try:
                        dimension = int(value)
                    except ValueError:
                        raise LoadError(f"Invalid DIMENSION: {value!r}") from None

        if start is None:
            raise LoadError("NODE_COORD_SECTION missing")
        if dimension is None:
            raise LoadError("DIMENSION missing before NODE_COORD_SECTION")
        if dimension <= 0:
            raise LoadError(f"DIMENSION must be positive, got {dimension}")

        edge_weight_type = metadata.get('EDGE_WEIGHT_TYPE', TSPLoader.DEFAULT_EDGE_WEIGHT_TYPE)
        if edge_weight_type not in EDGE_WEIGHT_TYPES:
            raise LoadError(f"Unsupported EDGE_WEIGHT_TYPE: {edge_weight_type}")

        # coordinate section parsing: exactly `dimension` records
        ids = []
        coords = []
        for line in lines[start:]:
            if not line:
                continue
            if len(coords) == dimension:
                # only an EOF marker may follow the last record
                if line == 'EOF':
                    break
                raise LoadError(f"Expected {dimension} node coordinates, found more")
            parts = line.split()
            if len(parts) != 3:
                raise LoadError(f"Error reading node coordinates: {line!r}")
            try:
                idx = int(parts[0])
                x = float(parts[1])
                y = float(parts[2])
            except ValueError:
                raise LoadError(f"Error reading node coordinates: {line!r}") from None
            if not (np.isfinite(x) and np.isfinite(y)):
                raise LoadError(f"Non-finite coordinates for node {idx}")
            ids.append(idx)
            coords.append([x, y])

        if len(coords) != dimension:
            raise LoadError(f"Expected {dimension} node coordinates, found {len(coords)}")

        problem = TSPInstance(
            np.array(coords),
            ids=ids,
            name=metadata.get('NAME'),
            comment=metadata.get('COMMENT'),
            edge_weight_type=edge_weight_type,
        )

        # Populate database if requested
        if populate:
            if db is None:
                raise ValueError("Database parameter 'db' must be provided when populate=True")

            problem_metadata = {
                'problem_name': metadata.get('NAME', 'unknown'),
                'comment': metadata.get('COMMENT', ''),
                'type': metadata.get('TYPE', 'TSP'),
                'dimension': dimension,
                'edge_weight_type': edge_weight_type,
            }

            TSPLoader._populate_database(db, problem_metadata)

        return problem

    @staticmethod
    def _populate_database(db, metadata: Dict):
        """
        Append the instance metadata as a new row of a pandas DataFrame
        """
        if hasattr(db, 'loc'):  # pandas DataFrame
            db.loc[len(db)] = metadata
        else:
            raise NotImplementedError(
                f"Database type {type(db).__name__} not supported, use a pandas DataFrame."
            )

    @staticmethod
    def load_multiple(filepaths: List[str], populate: bool = False, db = None) -> List[TSPInstance]:
        """
        Load multiple problem instances from a list of files, skipping the ones that fail

        Args:
            filepaths: List of file paths to load
            populate: If True, add problem metadata to the database
            db: pandas DataFrame to populate (required if populate=True)
        """
        problems = []
        for filepath in filepaths:
            try:
                problem = TSPLoader.load_from_file(filepath, populate=populate, db=db)
            except LoadError as e:
                print(f"✗ Failed to load {filepath}: {e}")
                continue
            problems.append(problem)
            print(f"✓ Loaded: {filepath} ({problem.n} cities)")

        return problems

    @staticmethod
    def load_from_directory(directory: str, pattern: str = "*.tsp", populate: bool = False, db = None) -> List[TSPInstance]:
        """
        Load all matching problem files from a directory

        Args:
            directory: Directory path containing problem files
            pattern: Glob pattern for matching files
            populate: If True, add problem metadata to the database
            db: pandas DataFrame to populate (required if populate=True)
        """
        dir_path = Path(directory)
        filepaths = sorted(str(f) for f in dir_path.glob(pattern))
        return TSPLoader.load_multiple(filepaths, populate=populate, db=db)
