"""Outgoing headers and HTTP clients for FDO onboarding and playbook dispatch."""