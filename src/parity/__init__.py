"""Number-word parity checking.

The parity layer decodes a whitespace-delimited string of number words (in a configured language)
into integers and answers whether their sum and their product are even.
"""

