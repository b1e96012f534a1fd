"""
Stacked bar chart package.

geometry/palette/hit_test are pure layout code; the renderer draws a
finished ChartLayout with matplotlib and saves it as SVG or PNG.
"""
