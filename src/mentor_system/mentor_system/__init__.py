"""Mentor System package.

Organized by feature modules (mentors, teams, tasks, payments) with a thin
Flask controller layer over service/repository layers.
"""
