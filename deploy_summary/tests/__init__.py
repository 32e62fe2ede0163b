"""
deploy-summary tests

Run with:
    pytest deploy_summary/tests/ -v
"""
