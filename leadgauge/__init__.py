"""
LeadGauge Business Audit Engine

Scores a business website and turns the result into sales leads:
1. Fetches the website and extracts markup signals
2. Scores six weighted business-health parameters (0-100)
3. Optionally enriches the audit with a Claude narrative
4. Synthesizes verified lead records from the audit
"""

__version__ = "0.1.0"
