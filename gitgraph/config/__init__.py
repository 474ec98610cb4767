"""Configuration: templates and persisted settings"""
