"""CCITT fax decoding for Group 4 coded data."""