"""
bdface.storage.fontformats - font format readers

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""
