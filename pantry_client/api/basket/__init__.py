"""Contains endpoint functions for accessing baskets"""
