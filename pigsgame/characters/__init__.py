"""Liv, pigs, cannons and cannon balls, their common interface, and the map-based builder."""