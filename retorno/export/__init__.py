"""Export destinations for the triaged roster."""
from retorno.export.sinks import ensure_output_dir, export_roster, write_excel

__all__ = ["ensure_output_dir", "export_roster", "write_excel"]
