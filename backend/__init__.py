"""
Service wiring for the Fit Journal API: settings, credentials, auth and the app factory.
"""
