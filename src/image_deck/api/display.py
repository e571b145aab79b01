"""Landing page served at the site root."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["display"])


@router.get("/", response_class=HTMLResponse)
async def display_page() -> HTMLResponse:
    """Display page: renders broadcast images, Space advances, R resets."""
    return HTMLResponse(_DISPLAY_HTML)


_DISPLAY_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Image Deck</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: #111; color: #eee; text-align: center; }
      header { padding: 1rem; display: flex; justify-content: space-between; }
      #stage { min-height: 70vh; display: flex; align-items: center;
               justify-content: center; flex-direction: column; }
      #stage img { max-width: 90vw; max-height: 65vh; }
      #name { font-size: 2rem; margin-top: 1rem; }
      #notice { color: #f7c948; min-height: 1.5rem; }
      button { padding: 0.4rem 0.8rem; margin-left: 0.5rem; }
    </style>
  </head>
  <body>
    <header>
      <span id="counters">Waiting for server...</span>
      <span>
        <button id="next">Next (Space)</button>
        <button id="reset">Reset (R)</button>
      </span>
    </header>
    <div id="stage">
      <div id="landing">Press Space to start.</div>
      <img id="image" alt="" hidden />
      <div id="name"></div>
    </div>
    <div id="notice"></div>
    <script>
      const scheme = location.protocol === 'https:' ? 'wss' : 'ws';
      const socket = new WebSocket(`${scheme}://${location.host}/socket`);
      const $ = (id) => document.getElementById(id);
      const send = (event) => socket.send(JSON.stringify({ event }));

      function showLanding() {
        $('image').hidden = true;
        $('name').textContent = '';
        $('landing').hidden = false;
      }

      const handlers = {
        'config': (c) => {
          $('counters').textContent =
            `Round ${c.shown} / ${c.rounds} | ${c.deckRemaining} left` +
            (c.inProgress ? '' : ' | idle');
        },
        'reset': (m) => { showLanding(); $('notice').textContent = m.message; },
        'show-image': (s) => {
          $('landing').hidden = true;
          $('image').src = s.url;
          $('image').alt = s.name;
          $('image').hidden = false;
          $('name').textContent = s.name;
          $('notice').textContent = '';
        },
        'deck-finished': (m) => { $('notice').textContent = m.message; },
        'game-over': (m) => { $('notice').textContent = m.message; },
        'error-msg': (text) => { $('notice').textContent = text; },
      };

      socket.addEventListener('message', (frame) => {
        const { event, data } = JSON.parse(frame.data);
        if (handlers[event]) handlers[event](data);
      });

      $('next').addEventListener('click', () => send('request-next'));
      $('reset').addEventListener('click', () => send('reset-game'));
      document.addEventListener('keydown', (e) => {
        if (e.code === 'Space') { e.preventDefault(); send('request-next'); }
        if (e.key === 'r' || e.key === 'R') send('reset-game');
      });
    </script>
  </body>
</html>
"""
