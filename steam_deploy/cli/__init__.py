"""Command line interface for steam-deploy"""
