"""
Tax Constants

New Zealand Goods and Services Tax.
"""

GST_RATE = 0.15
