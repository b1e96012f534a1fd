"""
PDC capacity simulator.

Computes station throughput capacity for the pick, pack and inbound flows
by hour, by shift and per day, overlays demand, and lays the result out as a
stacked bar chart.
"""

__version__ = "0.3.0"
