"""Fizz migration content from migration names and column arguments, and the creator that writes it."""