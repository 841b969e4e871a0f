
from dataclasses import dataclass

@dataclass
class RepairConfig:
    # Fragment discovery
    pattern: str = "**/*.md"
    encoding: str = "utf-8"
    output_suffix: str = ".html"

    # "module:callable"; empty means identity (dry run)
    parser: str = ""

    # Progress / reports
    checkpoint_path: str = "artifacts/convert_checkpoint.jsonl"
    qa_report_path: str = "artifacts/qa_report.csv"

    # Diagnostics
    warn_on_underrun: bool = True
    log_level: str = "INFO"
