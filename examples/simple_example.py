#!/usr/bin/env python3
"""
Simple Example: Easel Setup for a 35mm Print

Shows the print size, borders and blade readings for a few common setups.
"""

import dataclasses

from bordercalc import BorderCalculatorState, calculate, optimal_min_border

# 35mm frame on 8x10 paper, landscape, half-inch minimum border
state = BorderCalculatorState(paper_size="8x10", aspect_ratio="3:2", min_border=0.5)
result = calculate(state)

print(f"Paper: {result.paper_width:g} x {result.paper_height:g} in ({result.easel_size_label} easel)")
print(f"Print: {result.print_width:.3f} x {result.print_height:.3f} in")
for side, reading in result.blade_readings.items():
    print(f"  {side:>6} blade: {reading:.3f} in")

# Shift the print up a quarter inch for a heavier bottom border
offset = calculate(dataclasses.replace(state, enable_offset=True, vertical_offset=-0.25))
print(f"\nWith offset: top {offset.top_border:.3f} in, bottom {offset.bottom_border:.3f} in")

# A postcard sits in the 5x7 easel, so readings include the paper shift
postcard = calculate(BorderCalculatorState(paper_size="3.875x5.875", is_landscape=False))
print(f"\nPostcard in {postcard.easel_size_label} easel, shift {postcard.paper_shift_x:.4f} in")
for warning in postcard.warnings:
    print(f"  ! {warning}")

print(f"\nSuggested ruler-friendly border: {optimal_min_border(state):.2f} in")
