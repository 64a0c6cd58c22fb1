"""
Meaningful Naming - violation

The same task manager with cryptic names: ``TM`` for a task, ``Mgr`` for the
manager, single letters for fields and a mix of ``get``, ``fetch`` and bare
verbs for the queries. ``finish`` could mean complete or delete, ``late``
hides that it means overdue and the statistics come back keyed ``a`` to
``e``. Every reader needs the comments to follow it.
"""

from datetime import date


class TM:
    def __init__(self, id, t, d, dd, p):
        self.id = id
        self.t = t      # title
        self.d = d      # description
        self.dd = dd    # due date
        self.p = p      # priority
        self.c = False  # completed
        self.cd = None  # completion date

    def mC(self, x):
        self.c = True
        self.cd = x

    def check(self, x):
        return not self.c and x > self.dd

    def gtd(self, x):
        return (self.dd - x).days


class Mgr:
    def __init__(self, x):
        self.x = x
        self.data = []
        self.n = 1

    def add(self, t, d, dd, p):
        o = TM(self.n, t, d, dd, p)
        self.n += 1
        self.data.append(o)
        return o

    def find(self, i):
        return next((o for o in self.data if o.id == i), None)

    def getAll(self):
        return list(self.data)

    def fetchDone(self):
        return [o for o in self.data if o.c]

    def fetchTodo(self):
        return [o for o in self.data if not o.c]

    def late(self):
        return [o for o in self.data if o.check(self.x)]

    def withP(self, p):
        return [o for o in self.data if o.p == p]

    def finish(self, i):
        o = self.find(i)
        if o:
            o.mC(self.x)
            return True
        return False

    def remove(self, i):
        l = len(self.data)
        self.data = [o for o in self.data if o.id != i]
        return len(self.data) != l

    def srt(self):
        return sorted(self.data, key=lambda o: o.dd)

    def metrics(self):
        a = len(self.data)
        b = len(self.fetchDone())
        c = len(self.fetchTodo())
        d = len(self.late())
        return {"a": a, "b": b, "c": c, "d": d, "e": b / a * 100 if a else 0}


P = {"H": "h", "M": "m", "L": "l"}


def main():
    m = Mgr(date(2023, 7, 12))
    m.add("Buy groceries", "Milk, eggs, bread and vegetables", date(2023, 7, 15), P["M"])
    m.add("Complete project proposal", "Finish the budget and summary", date(2023, 7, 10), P["H"])
    t3 = m.add("Go for a run", "30 minutes in the park", date(2023, 7, 8), P["L"])
    m.finish(t3.id)

    print("All:")
    for o in m.srt():
        print(f"- {o.t} ({o.p}, {o.dd}, {'y' if o.c else 'n'})")

    print("\nLate:")
    for o in m.late():
        print(f"- {o.t} {o.gtd(m.x)}")

    print("\nH:")
    for o in m.withP(P["H"]):
        print(f"- {o.t}")

    s = m.metrics()
    print(f"\nMetrics: {s}")
    print("What do a, b, c, d and e stand for? Only the comments in metrics() know.")


if __name__ == "__main__":
    main()
