from splitledger.exports.csv_export import CSV_HEADERS, export_expenses_csv, export_filename

__all__ = ["CSV_HEADERS", "export_expenses_csv", "export_filename"]
