"""
Pathviz core — shortest-path search, replay and the playground facade.
"""
