"""Console entry point for the record-keeping samples.

Usage:
    itemvault warehouse
    itemvault healthcare --patient-id 1
    itemvault inventory --file inventory.json
    itemvault grading --input students.txt --output report.txt
    itemvault finance
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from itemvault.errors import DuplicateKeyError, InvalidValueError, MalformedRecordError
from itemvault.models.domain import Account, AccountKind, ElectronicItem
from itemvault.services.config_service import get_config_service
from itemvault.services.finance_service import FinanceService
from itemvault.services.grading_service import GradingService
from itemvault.services.healthcare_service import HealthcareService
from itemvault.services.inventory_service import InventoryService
from itemvault.services.warehouse_service import WarehouseService

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_amount(value: str) -> Decimal:
    """argparse type for a finite decimal amount."""
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    return amount


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def run_warehouse(args: argparse.Namespace) -> int:
    manager = WarehouseService()
    manager.seed_data()

    print("\nAll Grocery Items:")
    _print_lines(manager.format_items(manager.groceries))

    print("\nAll Electronic Items:")
    _print_lines(manager.format_items(manager.electronics))

    print("\n--- Exception Tests ---")

    try:
        manager.electronics.add(ElectronicItem(1, "Tablet", 4, "Lenovo", 18))
    except DuplicateKeyError as e:
        print(f"Duplicate Error: {e.message}")

    print(manager.remove_item_by_id(manager.groceries, 89))

    try:
        manager.electronics.update_quantity(1, -5)
    except InvalidValueError as e:
        print(f"Quantity Error: {e.message}")

    print(manager.increase_stock(manager.electronics, 1, 3))
    return 0


def run_healthcare(args: argparse.Namespace) -> int:
    app = HealthcareService()
    app.seed_data()
    app.build_prescription_map()

    print("----- All Patients -----")
    _print_lines(app.format_patients())

    patient_id = args.patient_id
    if patient_id is None:
        raw = input("\nEnter a patient ID to view prescriptions: ")
        try:
            patient_id = int(raw)
        except ValueError:
            print("Invalid input.")
            return 0

    print()
    _print_lines(app.format_prescriptions_for_patient(patient_id))
    return 0


def run_inventory(args: argparse.Namespace) -> int:
    path = Path(args.file) if args.file else None

    app = InventoryService(path)
    app.seed_sample_data()
    if app.save_data():
        print("Data saved to file successfully.")

    print("\nClearing in-memory data and loading from file...")

    new_app = InventoryService(path)
    if new_app.load_data():
        print("Data loaded from file successfully.")

    print("\n--- Inventory Items ---")
    _print_lines(new_app.format_items())
    return 0


def run_grading(args: argparse.Namespace) -> int:
    config = get_config_service()
    input_path = Path(args.input) if args.input else config.get_students_file()
    output_path = Path(args.output) if args.output else config.get_report_file()

    service = GradingService()

    try:
        students = service.read_students_from_file(input_path)
    except FileNotFoundError:
        print(f"Error: Input file not found: {input_path}")
        return 1
    except MalformedRecordError as e:
        print(f"Error: {e.message}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {input_path}: {e}")
        return 1

    try:
        service.write_report(students, output_path)
    except OSError as e:
        print(f"Error: Could not write report: {e}")
        return 1

    print(f"Report successfully generated in '{output_path}'")
    return 0


def run_finance(args: argparse.Namespace) -> int:
    account = Account("ACC77438", args.balance, AccountKind(args.account_kind))
    service = FinanceService()
    _print_lines(service.run(account, service.sample_batch()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="itemvault", description="Record-keeping samples")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Logging level (default: from config)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    warehouse = subparsers.add_parser("warehouse", help="Warehouse stock demo")
    warehouse.set_defaults(func=run_warehouse)

    healthcare = subparsers.add_parser("healthcare", help="Patient prescriptions demo")
    healthcare.add_argument("--patient-id", type=int, default=None,
                            help="Patient to show (prompts if omitted)")
    healthcare.set_defaults(func=run_healthcare)

    inventory = subparsers.add_parser("inventory", help="Inventory JSON save/load demo")
    inventory.add_argument("--file", default=None, help="Inventory JSON file (default: from config)")
    inventory.set_defaults(func=run_inventory)

    grading = subparsers.add_parser("grading", help="Student grading report")
    grading.add_argument("--input", default=None, help="Student results file (default: from config)")
    grading.add_argument("--output", default=None, help="Report file (default: from config)")
    grading.set_defaults(func=run_grading)

    finance = subparsers.add_parser("finance", help="Transactions demo")
    finance.add_argument("--balance", type=parse_amount, default=Decimal("10000"),
                         help="Opening balance (default: 10000)")
    finance.add_argument("--account-kind", choices=[k.value for k in AccountKind],
                         default=AccountKind.SAVINGS.value, help="Account kind (default: savings)")
    finance.set_defaults(func=run_finance)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or get_config_service().get_log_level()
    if level not in LOG_LEVELS:
        parser.error(
            f"invalid log level {level!r} in configuration "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
