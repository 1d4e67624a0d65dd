"""
GST Calculation Service

Functions for splitting prices into GST-exclusive and GST amounts.
Nothing here rounds; round only when displaying a final figure.
"""

from constants import GST_RATE


def calculate_gst(exclusive_price):
    """GST amount on a GST-exclusive price."""
    return exclusive_price * GST_RATE


def add_gst(exclusive_price):
    """GST-inclusive price from a GST-exclusive price."""
    return exclusive_price * (1 + GST_RATE)


def remove_gst(inclusive_price):
    """GST-exclusive price from a GST-inclusive price."""
    return inclusive_price / (1 + GST_RATE)


def get_gst_from_inclusive(inclusive_price):
    """GST amount contained in a GST-inclusive price."""
    return inclusive_price - remove_gst(inclusive_price)


def calculate_gst_breakdown(amount, gst_inclusive=False):
    """Split a single amount into exclusive, GST and inclusive parts."""
    if gst_inclusive:
        exclusive = remove_gst(amount)
        gst = get_gst_from_inclusive(amount)
    else:
        exclusive = amount
        gst = calculate_gst(amount)
    return {
        'total_exclusive': exclusive,
        'total_gst': gst,
        'total_inclusive': exclusive + gst,
    }


def calculate_total_with_gst(items):
    """
    Total a list of stock items with a GST breakdown.

    Each item is a dict with 'current_stock', 'price_per_unit' and an
    optional 'gst_inclusive' flag saying whether the price already includes
    GST. Items are split independently, so mixed lists are fine.
    """
    total_exclusive = 0.0
    total_gst = 0.0

    for item in items:
        item_total = item['current_stock'] * item['price_per_unit']
        breakdown = calculate_gst_breakdown(item_total, item.get('gst_inclusive', False))
        total_exclusive += breakdown['total_exclusive']
        total_gst += breakdown['total_gst']

    return {
        'total_exclusive': total_exclusive,
        'total_gst': total_gst,
        'total_inclusive': total_exclusive + total_gst,
    }
