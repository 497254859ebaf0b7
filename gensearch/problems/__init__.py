"""Example client problems for the search drivers."""

from .maze import Cell, Maze, MazeLocation, euclidean_distance, manhattan_distance
from .missionaries import MCState, MissionariesProblem, describe_solution
from .dna import Nucleotide, string_to_codon, string_to_gene

__all__ = [
    "Cell", "Maze", "MazeLocation", "euclidean_distance", "manhattan_distance",
    "MCState", "MissionariesProblem", "describe_solution",
    "Nucleotide", "string_to_codon", "string_to_gene",
]
