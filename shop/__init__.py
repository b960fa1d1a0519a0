"""
Shop Service - users, product catalog and order placement
"""
