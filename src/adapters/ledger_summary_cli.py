"""CLI adapter to print the receivable/payable summary of all parties."""

from src.adapters.reporting import build_summary_rows, render_table
from src.infrastructure.container import build_ledger_summary_use_case
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


def main() -> None:
    """Print the ledger summary for the configured customer type."""
    settings = LedgerSettings.from_env()
    customer_type = settings.default_customer_type
    use_case = build_ledger_summary_use_case()

    summary = use_case.execute(customer_type=customer_type)

    get_usage_logger().info(
        f"ledger_summary_cli customer_type={customer_type.value} "
        f"rows={len(summary.rows)}"
    )
    print(f"Ledger Summary - {customer_type.value} customers")
    print(render_table(build_summary_rows(summary)))


if __name__ == "__main__":  # pragma: no cover
    main()
