"""
Utility modules for ReviewLens.

Cross-cutting concerns:
- Spreadsheet: Decode uploaded workbooks into row dicts
"""
