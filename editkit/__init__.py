"""editkit - text helpers for editor components"""
