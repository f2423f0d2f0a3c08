"""
Pipeline stages for ReviewLens.

Contains the modules that turn spreadsheet rows into dashboard data:
- Text Normalization
- Ingestion Agent
- Word Frequency Counter
- Category Aggregator
- Display Selector
"""
