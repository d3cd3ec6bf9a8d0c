"""FCFS Seek — disk-head movement under First Come, First Served.

A disk arm services a queue of track requests strictly in the order
they arrived.  This package measures how far the arm travels doing so:
the total head movement and the average movement per request.

Modules:
    - ``workload`` — the fixed request list and starting head position.
    - ``disk`` — the FCFS policy and the request-queue scheduler.
    - ``movement`` — the head-movement calculator.
    - ``report`` — text rendering of the results.
    - ``logging`` — an in-memory structured log buffer.
    - ``cli`` — the command-line entry point.
"""

__version__ = "0.1.0"
