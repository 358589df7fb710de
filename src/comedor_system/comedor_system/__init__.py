"""Comedor System package.

Multi-tenant cafeteria meal attendance tracker organized by feature modules
(companies, cafeterias, employees, consumption, history, tablets) with a thin
Flask controller layer over service/repository layers.
"""
