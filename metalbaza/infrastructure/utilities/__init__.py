"""Shared utilities: constants, exceptions, i18n"""
