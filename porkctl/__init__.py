"""
porkctl - command-line client for the Porkbun domain registrar API
"""

__version__ = "0.1.0"
