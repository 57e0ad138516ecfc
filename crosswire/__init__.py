"""Crossed-wires solver: parse two wire paths, trace them, find the nearest crossing."""
