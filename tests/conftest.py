import pytest


ADD_JS = "function add(a,b){return a+b;}"
ADD_JS_RENAMED = "function add(x,y){return x+y;}"

TOTAL_JS = """\
// Sum the order lines and apply tax
function calculateTotal(items, taxRate) {
  let subtotal = 0;
  for (let i = 0; i < items.length; i++) {
    const item = items[i];
    if (item.quantity > 0) {
      subtotal += item.price * item.quantity;
    } else {
      continue;
    }
  }
  /* tax is applied
     once at the end */
  const tax = subtotal * taxRate;
  if (tax < 0) {
    return subtotal;
  }
  const total = subtotal + tax;
  return total;
}
"""

TOTAL_JS_RENAMED = """\
function computeSum(list, rate) {
  let sum = 0;
  for (let k = 0; k < list.length; k++) {
    const entry = list[k];
    if (entry.quantity > 0) {
      sum += entry.price * entry.quantity;
    } else {
      continue;
    }
  }
  const extra = sum * rate;
  if (extra < 0) {
    return sum;
  }
  const grand = sum + extra;
  return grand;
}
"""

SORT_PY = '''\
def bubble_sort(arr):
    """Sort a list in place with bubble sort."""
    n = len(arr)
    for i in range(n):
        swapped = False
        for j in range(0, n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break
    return arr


def merge_sort(values):
    # Split, sort both halves, merge
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    return merge(left, right)


def merge(left, right):
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def insertion_sort(items):
    for index in range(1, len(items)):
        current = items[index]
        position = index - 1
        while position >= 0 and items[position] > current:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = current
    return items


if __name__ == "__main__":
    print(bubble_sort([5, 2, 9, 1]))
    print(merge_sort([3, 8, 4, 7]))
'''


@pytest.fixture
def total_js():
    return TOTAL_JS


@pytest.fixture
def total_js_renamed():
    return TOTAL_JS_RENAMED


@pytest.fixture
def sort_py():
    return SORT_PY
