"""
The CONTROLLER layer turns mutation requests into collection updates and
placement instructions for whatever surface displays the list.
It depends on the model layer only; Qt enters through the contracts.
"""
