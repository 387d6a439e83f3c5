"""
Answer feature: answer/vote SQL and the standalone answer vote endpoint.
"""
