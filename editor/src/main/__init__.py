"""Main window mixins for the AR Scene Editor"""
