"""Global configuration: conversion factors, bounds, rounding."""

# 1 ft² in m²
SQFT_TO_M2 = 0.092903

# Base energy unit for every normalized quantity
BASE_ENERGY_UNIT = "kWh"

# Digits kept on each derived metric
EPI_DIGITS = 1
MEPI_DIGITS = 2
ECI_DIGITS = 2

# Oldest accepted construction year; the newest is current year + 1
MIN_YEAR_BUILT = 1800
MAX_YEAR_BUILT_AHEAD = 1

# Default horizon for cumulative cash-flow projections
CASH_FLOW_YEARS = 10

# Directory holding project-level config.json
CONFIG_DIR = ".epiaudit"
