"""
The CONTROLLER layer drives the evaluator over time.
animation.py is plain Python; driver.py binds it to a Qt timer.
"""
