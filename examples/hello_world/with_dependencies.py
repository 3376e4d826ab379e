"""
Task Dependencies Example

This example demonstrates:
1. Fan-in dependencies (one task waiting on several)
2. Registration order breaking ties between independent tasks
3. Catching a circular dependency before anything runs

Run: python with_dependencies.py
"""

from taskorder import CircularDependencyError, DependencyGraph, find_cycle

# Fetch and Parse are independent; Report needs both
graph = DependencyGraph()
graph.add_tasks(["Fetch", "Parse", "Report"])
graph.add_dependencies("Report", ["Fetch", "Parse"])
print("Execution Order: " + ", ".join(graph.execute_all()))

# A -> B -> C -> A can never be scheduled
cyclic = DependencyGraph()
cyclic.add_tasks(["A", "B", "C"])
cyclic.add_dependency("A", "B")
cyclic.add_dependency("B", "C")
cyclic.add_dependency("C", "A")

print("Cycle: " + " -> ".join(find_cycle(cyclic)))
try:
    cyclic.execute_all()
except CircularDependencyError as e:
    print(f"Error: {e}")
