"""Qt widgets built on the text helpers"""
