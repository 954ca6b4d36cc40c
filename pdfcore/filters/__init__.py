"""Decoders for PDF stream filters and dispatch by filter name."""