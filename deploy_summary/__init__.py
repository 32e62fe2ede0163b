"""
deploy-summary

Summarizes the contracts deployed by a transaction log, classifying each as
a Diamond (it received a CALL) or a Facet.

Usage:
    deploy-summary broadcast/Deploy.s.sol/1/run-latest.json
    python -m deploy_summary run-latest.json --json
"""

__version__ = "0.1.0"
