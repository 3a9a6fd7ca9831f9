"""Worked answers to the course exercises."""