"""
Simple Hello World Example

This is the most basic taskorder example. It demonstrates:
1. Registering tasks
2. Linking them with dependencies
3. Resolving the execution order

Run: python simple.py
"""

from taskorder import DependencyGraph

graph = DependencyGraph()
graph.add_task("Compile")
graph.add_task("Test")
graph.add_task("Deploy")

graph.add_dependency("Test", "Compile")
graph.add_dependency("Deploy", "Test")

print("Execution Order: " + ", ".join(graph.execute_all()))
