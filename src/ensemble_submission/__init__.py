"""Ensemble submission package.

Organized by feature modules (attendance, submissions, fines, reports, ...)
with a thin Flask controller layer over service/repository layers. Google
Sheets and Drive sit behind repository protocols.
"""
