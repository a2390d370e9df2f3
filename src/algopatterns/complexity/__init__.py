"""
Big-O Lessons
=============
Runnable material for the complexity analysis lessons.

Why is this package needed?
---------------------------
1. Examples: one small function per complexity class (O(1) ... O(n!)).
2. Optimization: inefficient and optimized solutions of the same problem,
   timed side by side over growing inputs.
3. Exercises: the worked solutions of the practice exercises.
4. Reporting: comparison tables and growth plots built on numpy/matplotlib.

Note: the algorithms here are pure Python; numpy is only used for test data
and curve fitting, matplotlib only in `plotting`.
"""
