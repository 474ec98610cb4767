"""Commit graph model and layout"""
