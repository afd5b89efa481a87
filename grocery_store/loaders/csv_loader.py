"""
CSV Loader - reads customer and order rows from delimited files
"""
import csv
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from grocery_store.config import Settings
from grocery_store.exceptions import LoadError
from grocery_store.schemas.rows import CustomerRow, OrderRow

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = ("id", "email", "street", "city", "state", "zip")
ORDER_COLUMNS = ("id", "products", "customer_id", "fulfillment_status")

PRODUCT_SEPARATOR = ";"
PRICE_SEPARATOR = ":"

RowT = TypeVar("RowT", bound=BaseModel)


def parse_products(value: str) -> Dict[str, str]:
    """
    Split an encoded product list into name -> price text

    Format: ``name:price`` pairs joined by ``;``, e.g. ``Lobster:17.18;Camomile:83.21``.
    The price is taken after the last ``:`` so names may contain colons.

    Raises:
        ValueError: If a pair is malformed or a name repeats
    """
    products: Dict[str, str] = {}
    if not value.strip():
        return products

    for pair in value.split(PRODUCT_SEPARATOR):
        name, sep, price = pair.rpartition(PRICE_SEPARATOR)
        name = name.strip()
        if not sep or not name or not price.strip():
            raise ValueError(f"malformed product entry {pair!r}")
        if name in products:
            raise ValueError(f"duplicate product {name!r}")
        products[name] = price.strip()
    return products


class CsvLoader:
    """Reads the customers and orders files into typed rows"""

    def __init__(self, customers_path: Union[str, Path], orders_path: Union[str, Path]):
        self.customers_path = Path(customers_path)
        self.orders_path = Path(orders_path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CsvLoader":
        """Build a loader from configured paths"""
        return cls(settings.CUSTOMERS_CSV_PATH, settings.ORDERS_CSV_PATH)

    def read_customers(self) -> List[CustomerRow]:
        """
        Read all customer rows in file order

        Raises:
            LoadError: If the file is missing or any row is malformed
        """
        rows = [
            self._validate(CustomerRow, dict(zip(CUSTOMER_COLUMNS, fields)), self.customers_path, line)
            for line, fields in self._read(self.customers_path, CUSTOMER_COLUMNS)
        ]
        logger.info(f"Loaded {len(rows)} customers from {self.customers_path}")
        return rows

    def read_orders(self) -> List[OrderRow]:
        """
        Read all order rows in file order

        Raises:
            LoadError: If the file is missing or any row is malformed
        """
        rows = []
        for line, fields in self._read(self.orders_path, ORDER_COLUMNS):
            data = dict(zip(ORDER_COLUMNS, fields))
            try:
                data["products"] = parse_products(data["products"])
            except ValueError as e:
                raise LoadError(str(e), self.orders_path, line) from e
            rows.append(self._validate(OrderRow, data, self.orders_path, line))
        logger.info(f"Loaded {len(rows)} orders from {self.orders_path}")
        return rows

    @staticmethod
    def _validate(schema: Type[RowT], data: Dict[str, object], path: Path, line: int) -> RowT:
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise LoadError(f"invalid row ({problems})", path, line) from e

    @staticmethod
    def _read(path: Path, columns: Sequence[str]) -> List[Tuple[int, List[str]]]:
        """Return (line number, fields) for each data row after checking the header"""
        rows = []
        try:
            with path.open(newline="", encoding="utf-8") as handle:
                reader = csv.reader(handle)
                header = next(reader, None)
                if header is None:
                    raise LoadError("file is empty", path)
                if tuple(column.strip() for column in header) != tuple(columns):
                    raise LoadError(
                        f"unexpected header {header!r}, expected {list(columns)!r}", path, reader.line_num
                    )
                for fields in reader:
                    if not fields:
                        continue
                    if len(fields) != len(columns):
                        raise LoadError(
                            f"expected {len(columns)} columns, got {len(fields)}", path, reader.line_num
                        )
                    rows.append((reader.line_num, fields))
        except OSError as e:
            raise LoadError(f"cannot read file: {e.strerror or e}", path) from e
        except UnicodeDecodeError as e:
            raise LoadError(f"file is not valid UTF-8: {e.reason}", path) from e
        except csv.Error as e:
            raise LoadError(f"malformed CSV: {e}", path) from e
        return rows
