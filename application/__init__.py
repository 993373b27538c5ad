"""
Application Layer for the Fit Journal API.

This package contains:
- ports/: Abstract repository and credential interfaces (what the domain needs)
- use_cases/: Account and workout workflows
- errors.py: Typed failures shared by every layer below the routers
"""
