"""Inline single-page UI served at the root path."""

DASHBOARD_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Calorie Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.25rem; }
      .row { display: flex; gap: 2rem; flex-wrap: wrap; margin-bottom: 1.5rem; }
      .card { border: 1px solid #ddd; border-radius: 8px; padding: 1rem; min-width: 280px; }
      .stat { font-size: 1.5rem; font-weight: 700; }
      .error { color: #c0392b; min-height: 1.2rem; }
      input, select { padding: 0.4rem 0.6rem; margin: 0.2rem 0; width: 100%; }
      button { padding: 0.4rem 0.8rem; margin-top: 0.4rem; }
      ul { padding-left: 1rem; }
    </style>
  </head>
  <body>
    <h1>Calorie Tracker</h1>
    <p>Your AI-assisted daily calorie and workout tracker.</p>
    <div class="row">
      <div class="card">
        <svg width="200" height="200" viewBox="0 0 200 200">
          <g transform="rotate(-90 100 100)">
            <circle cx="87.5" cy="87.5" r="72.5" fill="transparent"
              stroke="#e2e8f0" stroke-width="15" transform="translate(12.5 12.5)" />
            <circle id="ring" cx="87.5" cy="87.5" r="72.5" fill="transparent"
              stroke="#10b981" stroke-width="15" stroke-linecap="round"
              transform="translate(12.5 12.5)" />
          </g>
          <text x="100" y="100" text-anchor="middle" class="stat" id="consumed">0</text>
          <text x="100" y="122" text-anchor="middle">Consumed</text>
        </svg>
        <p><span id="remaining">0</span> kcal remaining</p>
        <p>Goal: <span id="goal">0</span> kcal</p>
      </div>
      <div class="card">
        <p>Burned</p><p class="stat" id="burned">0</p>
        <p>Net</p><p class="stat" id="net">0</p>
      </div>
    </div>
    <div class="row">
      <form class="card" id="meal-form">
        <h2>Add a Meal</h2>
        <label>Food Description</label>
        <input id="meal-description" placeholder="e.g., 2 eggs, 1 slice of toast, 1 apple" />
        <label>Calories (kcal)</label>
        <input id="meal-calories" type="number" placeholder="e.g., 350" />
        <button type="button" id="meal-estimate">Estimate</button>
        <label>Meal Type</label>
        <select id="meal-type">
          <option value="breakfast">Breakfast</option>
          <option value="lunch">Lunch</option>
          <option value="dinner">Dinner</option>
          <option value="snack">Snack</option>
        </select>
        <p class="error" id="meal-error"></p>
        <button type="submit">Add Meal</button>
      </form>
      <form class="card" id="workout-form">
        <h2>Add a Workout</h2>
        <label>Workout Description</label>
        <input id="workout-description" placeholder="e.g., 30 minute run" />
        <label>Calories Burned (kcal)</label>
        <input id="workout-calories" type="number" placeholder="e.g., 300" />
        <button type="button" id="workout-estimate">Estimate</button>
        <p class="error" id="workout-error"></p>
        <button type="submit">Add Workout</button>
      </form>
    </div>
    <div class="row">
      <div class="card"><h2>Today's Meals</h2><div id="meals">No meals logged yet.</div></div>
      <div class="card"><h2>Today's Workouts</h2><div id="workouts">No workouts logged yet.</div></div>
    </div>
    <script>
      const CIRCUMFERENCE = 72.5 * 2 * Math.PI;

      function text(id, value) {
        document.getElementById(id).textContent = value;
      }

      function escapeHtml(value) {
        const node = document.createElement('span');
        node.textContent = value;
        return node.innerHTML;
      }

      async function refresh() {
        const res = await fetch('/api/dashboard');
        const data = await res.json();
        text('consumed', data.consumed.toLocaleString());
        text('burned', data.burned.toLocaleString() + ' kcal');
        text('net', data.net.toLocaleString() + ' kcal');
        text('goal', data.progress.goal.toLocaleString());
        text('remaining', data.progress.remaining.toLocaleString());
        const ring = document.getElementById('ring');
        ring.setAttribute('stroke-dasharray', CIRCUMFERENCE + ' ' + CIRCUMFERENCE);
        ring.setAttribute(
          'stroke-dashoffset',
          CIRCUMFERENCE - (data.progress.percentage / 100) * CIRCUMFERENCE
        );
        const meals = document.getElementById('meals');
        meals.innerHTML = data.meal_groups.length === 0 ? 'No meals logged yet.' :
          data.meal_groups.map(group =>
            '<h3>' + group.meal_type + '</h3><ul>' +
            group.meals.map(m =>
              '<li>' + escapeHtml(m.description) + ': ' + m.calories + ' kcal</li>'
            ).join('') + '</ul>'
          ).join('');
        const workouts = document.getElementById('workouts');
        workouts.innerHTML = data.workouts.length === 0 ? 'No workouts logged yet.' :
          '<ul>' + data.workouts.map(w =>
            '<li>' + escapeHtml(w.description) + ': ' + w.calories_burned + ' kcal</li>'
          ).join('') + '</ul>';
      }

      async function estimate(kind) {
        const button = document.getElementById(kind + '-estimate');
        button.disabled = true;
        try {
          const res = await fetch('/api/estimates/' + kind, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({
              description: document.getElementById(kind + '-description').value
            })
          });
          const data = await res.json();
          text(kind + '-error', data.error || '');
          if (data.calories !== null && data.calories !== undefined) {
            document.getElementById(kind + '-calories').value = data.calories;
          }
        } catch (err) {
          text(kind + '-error', 'Could not estimate calories. Please enter manually.');
        } finally {
          button.disabled = false;
        }
      }

      async function submitEntry(event, kind, path, body) {
        event.preventDefault();
        const res = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body)
        });
        if (!res.ok) {
          const data = await res.json();
          text(kind + '-error', data.error || 'Please fill out all fields with valid values.');
          return;
        }
        event.target.reset();
        text(kind + '-error', '');
        await refresh();
      }

      function calories(id) {
        const value = document.getElementById(id).value;
        return value === '' ? null : parseInt(value, 10);
      }

      document.getElementById('meal-estimate').onclick = () => estimate('meal');
      document.getElementById('workout-estimate').onclick = () => estimate('workout');
      document.getElementById('meal-form').onsubmit = (event) =>
        submitEntry(event, 'meal', '/api/meals', {
          description: document.getElementById('meal-description').value,
          calories: calories('meal-calories'),
          meal_type: document.getElementById('meal-type').value
        });
      document.getElementById('workout-form').onsubmit = (event) =>
        submitEntry(event, 'workout', '/api/workouts', {
          description: document.getElementById('workout-description').value,
          calories_burned: calories('workout-calories')
        });
      refresh();
    </script>
  </body>
</html>
"""
