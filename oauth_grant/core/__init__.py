"""Core configuration, errors and wiring"""
