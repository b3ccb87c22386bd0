"""Command-line interface for salesaudit.

Usage:
    salesaudit report [csv_file] [--sample]
    salesaudit validate [csv_file] [--sample]
    salesaudit export [csv_file] [--sample] [--out DIR]
"""
