"""
Orchestration package - claim intake flow and LLM plumbing
"""
