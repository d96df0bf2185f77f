"""
ClaimGenie - conversational insurance claim intake
"""
__version__ = "1.0.0"
