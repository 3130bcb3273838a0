"""Settings for editkit"""
