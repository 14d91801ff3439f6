# Routes package init
"""
Palindrome API — API Routes Package
====================================

Route Inventory:
    - palindrome.py: GET  /ispalindrome       (stateless check)
                     POST /savepalindrome     (check and store)
    - words.py:      GET    /words            (list stored words)
                     DELETE /words/{word_id}  (delete by id)
    - health.py:     GET  /health             (service health check)

Routes stay thin: read parameters, call the predicate or the WordStore,
return a response model. Errors are raised, never formatted here.
"""
