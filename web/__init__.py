"""
web - Flask интерфейс Peg Solitaire.
"""
