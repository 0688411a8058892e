"""Contains endpoint functions for accessing the pantry itself"""
